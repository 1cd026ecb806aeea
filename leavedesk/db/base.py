"""
Declarative base shared by all models
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest value an INTEGER primary key can hold on PostgreSQL
MAX_INTEGER_ID = 2**31 - 1
