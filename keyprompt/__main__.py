"""
module keyprompt.__main__

Default entrypoint when keyprompt is invoked on the console by a user.
Calls the main() function in keyprompt.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
