import sys

from foundry_stats.cli import main

sys.exit(main())
