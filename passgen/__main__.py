import sys

from passgen.main import main

sys.exit(main())
