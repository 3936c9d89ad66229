from quoteproxy.models.symbol import Symbol  # noqa: F401
from quoteproxy.models.price import PriceHistory  # noqa: F401
