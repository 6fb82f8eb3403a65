import sys

from obj2webgl.cli import main

sys.exit(main())
