"""HTTP middleware: request ID.

Applied in main app; order matters (first added = outermost).
"""

from tenant_management.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
