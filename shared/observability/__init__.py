from .setup import setup_observability
from .metrics import (
    shop_signup_total,
    shop_login_total,
    shop_cart_additions_total,
)
