"""
Wrapper script for running the catalog server locally.

Equivalent to ``uvicorn catalog:app --host 0.0.0.0 --port 8000``.
"""

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("catalog:app", host="0.0.0.0", port=8000)
