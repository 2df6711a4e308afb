from sqlalchemy import Column, Integer, String, Text, Date, CheckConstraint, Index
from database import Base
from constants import FieldLimits


class BusinessCard(Base):
    """
    A single business card.

    Photo holds the Base64 text of a JPEG image. The column was bounded
    (VARCHAR(500)) before revision 20241005231120 and is unbounded TEXT since.
    Name and email are not unique; duplicates are allowed.
    """
    __tablename__ = 'business_cards'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.NAME), nullable=False)
    gender = Column(String(FieldLimits.GENDER), nullable=True)
    date_of_birth = Column(Date, nullable=False)
    email = Column(String(FieldLimits.EMAIL), nullable=False)
    phone = Column(String(FieldLimits.PHONE), nullable=True)
    address = Column(String(FieldLimits.ADDRESS), nullable=True)
    photo = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_business_cards_name_not_empty'),
        CheckConstraint("email != ''", name='ck_business_cards_email_not_empty'),
        Index('idx_business_cards_email', 'email'),
    )

    def __repr__(self):
        return f"<BusinessCard id={self.id} name={self.name!r}>"
