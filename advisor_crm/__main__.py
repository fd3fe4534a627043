from advisor_crm.main import main

raise SystemExit(main())
