from fastapi import Depends

from app.db.couchdb import get_couch
from app.repos.posts_repo import CouchPostsRepo, FilesystemPostsRepo
from app.services.posts_service import PostsService
from app.settings import settings


def get_posts_repo():
    if settings.CONTENT_SOURCE == "couchdb":
        return CouchPostsRepo(get_couch())
    return FilesystemPostsRepo(settings.CONTENT_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
