from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
    false,
    text,
    true,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()
metadata = Base.metadata


ONLINE_PENDING = "pending"
ONLINE_CONFIRMED = "confirmed"
ONLINE_CANCELLED = "cancelled"

MANUAL_SCHEDULED = "scheduled"
MANUAL_DONE = "done"
MANUAL_CANCELLED = "cancelled"

CANCELLED_STATUSES = (ONLINE_CANCELLED, MANUAL_CANCELLED)


class Services(Base):
    __tablename__ = 'services'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Float, nullable=False)
    duration = Column(Integer, nullable=False)
    active = Column(Boolean, nullable=False, server_default=true(), default=True)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))


class Clients(Base):
    __tablename__ = 'clients'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    cpf = Column(Text)
    email = Column(Text)
    birthdate = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))


class OnlineAppointments(Base):
    __tablename__ = 'online_appointments'

    id = Column(Integer, primary_key=True)
    client_name = Column(Text, nullable=False)
    client_cpf = Column(Text, nullable=False, server_default=text("''"), default='')
    client_phone = Column(Text, nullable=False)
    client_email = Column(Text)
    service_id = Column(ForeignKey('services.id', ondelete='SET NULL'))
    appointment_date = Column(Text, nullable=False)
    appointment_time = Column(Text, nullable=False)
    status = Column(Text, nullable=False, server_default=text(f"'{ONLINE_PENDING}'"), default=ONLINE_PENDING)
    notes = Column(Text)
    reminder_sent = Column(Boolean, nullable=False, server_default=false(), default=False)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))
    confirmed_at = Column(DateTime)
    cancelled_at = Column(DateTime)


class Appointments(Base):
    __tablename__ = 'appointments'

    id = Column(Integer, primary_key=True)
    client_id = Column(ForeignKey('clients.id', ondelete='SET NULL'))
    service_id = Column(ForeignKey('services.id', ondelete='SET NULL'))
    appointment_date = Column(Text, nullable=False)
    appointment_time = Column(Text, nullable=False)
    status = Column(Text, nullable=False, server_default=text(f"'{MANUAL_SCHEDULED}'"), default=MANUAL_SCHEDULED)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))


class SlotClaims(Base):
    """One row per (date, time) held by a non-cancelled appointment."""
    __tablename__ = 'slot_claims'
    __table_args__ = (
        UniqueConstraint('appointment_date', 'appointment_time'),
    )

    id = Column(Integer, primary_key=True)
    appointment_date = Column(Text, nullable=False)
    appointment_time = Column(Text, nullable=False)
    online_appointment_id = Column(ForeignKey('online_appointments.id', ondelete='CASCADE'))
    appointment_id = Column(ForeignKey('appointments.id', ondelete='CASCADE'))


class Sales(Base):
    __tablename__ = 'sales'

    id = Column(Integer, primary_key=True)
    client_id = Column(ForeignKey('clients.id', ondelete='SET NULL'))
    service_id = Column(ForeignKey('services.id', ondelete='SET NULL'))
    value = Column(Float, nullable=False)
    payment_method = Column(Text, nullable=False)
    sale_date = Column(Text, nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))


class Products(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    category = Column(Text)
    quantity = Column(Integer, nullable=False, server_default=text('0'), default=0)
    min_stock = Column(Integer, nullable=False, server_default=text('5'), default=5)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))


class Reviews(Base):
    __tablename__ = 'reviews'
    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5'),
    )

    id = Column(Integer, primary_key=True)
    client_name = Column(Text, nullable=False)
    client_phone = Column(Text, unique=True)
    client_cpf = Column(Text, unique=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    approved = Column(Boolean, nullable=False, server_default=true(), default=True)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))
