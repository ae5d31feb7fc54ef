from prometheus_client import Counter

# Business Metrics
shop_signup_total = Counter(
    "shop_signup_total",
    "Signup attempts",
    ["status"]  # Labels: 'success', 'duplicate', 'invalid', 'error'
)

shop_login_total = Counter(
    "shop_login_total",
    "Login attempts",
    ["status"]  # Labels: 'success', 'failed'
)

shop_cart_additions_total = Counter(
    "shop_cart_additions_total",
    "Products added to carts"
)
