from spotidealer.cli import main

raise SystemExit(main())
