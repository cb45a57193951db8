"""
Lets "py -m yard" behave like the "yard" command.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from yard.cmdline import main

main()
