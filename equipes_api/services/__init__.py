"""
High-level use cases.

Each service module orchestrates the repository to implement the account and
document rules. Routers call these services instead of opening sessions.
"""
