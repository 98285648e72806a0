"""
Pieces every resource package leans on: the asyncpg pool and query helpers
(`db`), environment settings (`config`), the `{error: {message, status}}`
error type and handlers (`errors`), and the table DDL (`schema`).
"""
