from fastapi import Response


def no_store(response: Response) -> None:
    """Listing responses reflect the current dataset files; never let clients cache them."""
    response.headers["Cache-Control"] = "no-store"
