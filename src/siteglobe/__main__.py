# SPDX-License-Identifier: Apache-2.0
from siteglobe.cli import main

raise SystemExit(main())
