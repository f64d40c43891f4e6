from binance_futures.cli import main

raise SystemExit(main())
