"""Main entry point for the AirGuard Mission Planner.

Run FastAPI server:
    uvicorn airguard.main:app --reload
"""
if __name__ == '__main__':
    import uvicorn
    uvicorn.run("airguard.main:app", host="0.0.0.0", port=8000, reload=True)
