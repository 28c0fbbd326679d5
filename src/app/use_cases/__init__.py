"""
Use Cases

Organized into domain folders:
- auth/: Authentication flows (register, login, refresh, logout)
- users/: Account self-service (profile, password, sessions)
- audit/: Activity log
- admin/: System administration (account status, record sweep)
"""
