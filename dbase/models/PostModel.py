import pydantic


class Author(pydantic.BaseModel):
    firstName: str
    lastName: str


class Post(pydantic.BaseModel):
    id: str
    title: str
    content: str
    author: Author

    @classmethod
    def from_document(cls, document: dict) -> "Post":
        return cls(
            id=str(document["_id"]),
            title=document["title"],
            content=document["content"],
            author=Author.model_validate(document["author"]),
        )


class PostRepresentation(pydantic.BaseModel):
    id: str
    title: str
    content: str
    author: str


def author_name(author: Author) -> str:
    return f"{author.firstName} {author.lastName}".strip()


def to_representation(post: Post) -> PostRepresentation:
    """Public shape of a post: the author sub-document flattens to one display name."""
    return PostRepresentation(
        id=post.id,
        title=post.title,
        content=post.content,
        author=author_name(post.author),
    )
