import sys

from mscript.main import main


sys.exit(main())
