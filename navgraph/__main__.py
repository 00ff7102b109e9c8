import sys

from navgraph.main import main

sys.exit(main())
