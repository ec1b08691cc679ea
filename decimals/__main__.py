from decimals.cli import main

raise SystemExit(main())
