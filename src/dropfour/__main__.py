from __future__ import annotations

from dropfour.main import main

raise SystemExit(main())
