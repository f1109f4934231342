import sys

from meta_collector.cli import main

sys.exit(main())
