import sys

from vncorenlp.cli import main

sys.exit(main())
