import sys

from contract_registry.cli import main

sys.exit(main())
