"""
Session Remote - Session Exchange Service

Lets stateless web applications borrow and return server-side session
state over two HTTP subrequests, without knowing how sessions are stored.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- schema: Request/response shape contracts
- identity: Cookie parsing and session id resolution
- session: Session manager and stores
- service: Begin/finish dispatch, validation and error boundary
- states: REST API over individual session states
- client: HTTP client for the begin/finish protocol
"""

__version__ = "1.0.0"
