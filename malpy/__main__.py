import sys

from malpy.repl import main

sys.exit(main())
