import sys

from marquee_engine.cli import main


sys.exit(main())
