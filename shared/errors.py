"""Error hierarchy for the storefront.

Every error carries a stable code and the HTTP status it maps to when it
escapes a handler. Form handlers catch the auth errors themselves and show
``message`` next to the form.
"""


class StorefrontError(Exception):
    """Base exception for all storefront failures."""

    code = "STOREFRONT_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# --- Domain errors ---

class DuplicateUsername(StorefrontError):
    code = "DUPLICATE_USERNAME"
    http_status = 409

    def __init__(self, username: str):
        super().__init__("Username already taken!")
        self.username = username


class InvalidSignup(StorefrontError):
    code = "INVALID_SIGNUP"
    http_status = 400


class InvalidCredentials(StorefrontError):
    """Unknown user and wrong password both end up here, with one message."""

    code = "INVALID_CREDENTIALS"
    http_status = 401

    def __init__(self):
        super().__init__("Invalid credentials!")


class ProductNotFound(StorefrontError):
    code = "PRODUCT_NOT_FOUND"
    http_status = 404

    def __init__(self, product_id):
        super().__init__("404 page not found")
        self.product_id = product_id


# --- Infrastructure errors ---

class StoreError(StorefrontError):
    code = "STORE_ERROR"
    http_status = 503

    def __init__(self, operation: str):
        super().__init__(f"Database {operation} failed")
        self.operation = operation
