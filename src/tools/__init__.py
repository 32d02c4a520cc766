from tools.budget import alerts  # noqa: F401
from tools.forecast import spending_trend  # noqa: F401
from tools.goals import progress  # noqa: F401
from tools.ledger import categorize, category_breakdown  # noqa: F401
