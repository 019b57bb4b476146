# bank_account_service/infra/db/models/account.py
from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bank_account_service.domain.entities.account import AccountType
from bank_account_service.infra.db.base import Base


class BankAccountRow(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    balance = Column(Float, nullable=False, default=0.0)
    currency = Column(String(10), nullable=False)  # MAD, USD...
    type = Column(Enum(AccountType, name="account_type"), nullable=False)

    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    customer = relationship("CustomerRow", back_populates="accounts", lazy="raise")
