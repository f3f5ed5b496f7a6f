# waterbot/handlers/__init__.py
# main.py includes start.router; importing this package pulls in every
# module below so they attach their handlers to that shared router.

from . import start     # creates router, /start and /stop
from . import settings  # /set, /setbmi
from . import water     # /add and the reminder "I Drank!" button
from . import stats     # /stats, /waterintakeinfo
from . import donate    # /donate and currency buttons
from . import suggest   # /suggest
from . import help      # /help
