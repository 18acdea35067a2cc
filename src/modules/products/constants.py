"""Product domain constants.

Field limits enforced by ``modules.products.validators`` at creation
time and mirrored by the CHECK constraints on the ``products`` table.
"""

import re
from decimal import Decimal

CODE_MIN_LENGTH = 3
CODE_MAX_LENGTH = 20
CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

# Codes and names are stored as supplied, surrounding whitespace included,
# so the columns are wider than the trimmed limits above.
TEXT_COLUMN_LENGTH = 255

PRICE_MIN = Decimal("0.01")
PRICE_MAX = Decimal("999999.99")

QUANTITY_MIN = 0
QUANTITY_MAX = 1_000_000
