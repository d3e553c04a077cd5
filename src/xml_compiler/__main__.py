import sys

from xml_compiler.cli import main

sys.exit(main())
