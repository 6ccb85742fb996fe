"""
Wrapper script for running the server locally.
"""

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "course_library:application", factory=True, host="0.0.0.0", port=8000
    )
