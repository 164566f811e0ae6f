from pubg_stats.main import main

raise SystemExit(main())
