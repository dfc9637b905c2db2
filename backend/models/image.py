# backend/models/image.py
from sqlalchemy import Column, Integer, String, LargeBinary, ForeignKey
from sqlalchemy.orm import relationship, deferred
from database import Base

# Represents an uploaded product picture stored directly in the database
class Image(Base):
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String, nullable=False)
    file_type = Column(String, nullable=False) # MIME type, e.g. image/png

    # Raw bytes, loaded only when the row is downloaded or rewritten
    image = deferred(Column(LargeBinary, nullable=False))

    # Final value is known only after the first flush assigns the id
    download_url = Column(String, nullable=True)

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), index=True, nullable=False)
    product = relationship("Product")
