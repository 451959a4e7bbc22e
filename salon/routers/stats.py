# salon/routers/stats.py

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_clock, require_admin
from ..models.tables import (
    Appointments,
    Clients,
    MANUAL_CANCELLED,
    ONLINE_CONFIRMED,
    ONLINE_PENDING,
    OnlineAppointments,
    Sales,
)
from ..schemas.stats import StatsResponse
from ..services.clock import BusinessClock

router = APIRouter(
    prefix="/api/admin/stats",
    tags=["stats"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=StatsResponse)
def get_stats(
    db: Session = Depends(get_db),
    clock: BusinessClock = Depends(get_clock),
):
    today = clock.today().isoformat()
    month_start = clock.first_day_of_month().isoformat()

    manual_today = (
        db.query(func.count(Appointments.id))
        .filter(
            Appointments.appointment_date == today,
            Appointments.status != MANUAL_CANCELLED,
        )
        .scalar()
    )
    online_today = (
        db.query(func.count(OnlineAppointments.id))
        .filter(
            OnlineAppointments.appointment_date == today,
            OnlineAppointments.status == ONLINE_CONFIRMED,
        )
        .scalar()
    )
    month_revenue, month_sales = (
        db.query(func.coalesce(func.sum(Sales.value), 0), func.count(Sales.id))
        .filter(Sales.sale_date >= month_start)
        .one()
    )
    total_clients = db.query(func.count(Clients.id)).scalar()
    pending = (
        db.query(func.count(OnlineAppointments.id))
        .filter(OnlineAppointments.status == ONLINE_PENDING)
        .scalar()
    )

    return StatsResponse(
        todayAppointments=manual_today + online_today,
        monthRevenue=float(month_revenue),
        totalClients=total_clients,
        monthSales=month_sales,
        pendingAppointments=pending,
    )
