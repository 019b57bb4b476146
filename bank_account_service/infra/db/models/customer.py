# bank_account_service/infra/db/models/customer.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bank_account_service.infra.db.base import Base


class CustomerRow(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    accounts = relationship("BankAccountRow", back_populates="customer", lazy="raise")
