from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest value an Integer primary key column holds on every supported backend.
MAX_ID = 2**31 - 1
