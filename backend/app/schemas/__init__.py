# Schemas package init
"""
Pydantic request/response models. They are separate from the SQLAlchemy
models so the API contract (camelCase, projected author fields) can differ
from the table layout.
"""
