from fastapi import FastAPI
from frontend.routers import rou_auth, rou_booking, rou_photographer, rou_package, rou_portfolio, rou_dashboard, rou_admin
from frontend.configuration.monitor import instrument_fastapi
from frontend.services.svc_api import register_error_handlers

app = FastAPI(
    title="PhotoBooking",
    description="Views for the photography booking marketplace",
    version="1.0.0"
)

# Include all routers
app.include_router(rou_auth.router)  # Auth routes should typically be first
app.include_router(rou_booking.router)
app.include_router(rou_photographer.router)
app.include_router(rou_package.router)
app.include_router(rou_portfolio.router)
app.include_router(rou_dashboard.router)
app.include_router(rou_admin.router)

# Validation failures become notifications
register_error_handlers(app)

# Instrument app with Azure Monitor
instrument_fastapi(app)

if __name__ == '__main__':
    import uvicorn
    uvicorn.run(app, host='0.0.0.0', port=8000)
