from sqlalchemy import Column, Integer, Numeric, String

from products_api.db import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    product_name = Column(String(256), nullable=True)
    unit_price = Column(Numeric(15, 2), nullable=False, default=0)

    def __repr__(self):
        return f"<Product id={self.id} name={self.product_name}>"
