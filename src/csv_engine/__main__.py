import sys

from csv_engine.cli import main

sys.exit(main())
