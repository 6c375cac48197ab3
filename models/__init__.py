# backend/models/__init__.py
# This file simply re-exports the models so `import models` populates SQLModel metadata.
from .contact_message import *
