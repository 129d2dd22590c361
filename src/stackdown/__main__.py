from stackdown.cli import main

raise SystemExit(main())
