# salon/schemas/stats.py

from pydantic import BaseModel


class StatsResponse(BaseModel):
    todayAppointments: int
    monthRevenue: float
    totalClients: int
    monthSales: int
    pendingAppointments: int
