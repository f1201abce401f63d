"""
auth — User authentication module.

Provides:
  • Token creation & verification (HMAC-SHA256)
  • Password hashing (bcrypt)
  • Register / Login / Profile API routes
  • ``get_current_user_id`` FastAPI dependency
"""
