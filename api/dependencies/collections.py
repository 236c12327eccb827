from fastapi import Request

from dbase.collections.PostCollection import PostCollection


def get_post_collection(request: Request) -> PostCollection:
    """Shared PostCollection built once in the app lifespan."""
    return request.app.state.posts
