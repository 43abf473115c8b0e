"""Blog post as read from the hosted content repository.

Posts are not stored by this service; they are fetched from the content
repository and only searched here.
"""

from pydantic import Field

from journal.domain.model.common import DomainModel


class BlogPost(DomainModel):
    """A markdown post with its frontmatter."""

    slug: str
    title: str
    content: str
    excerpt: str | None = None
    date: str
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    image: str | None = None

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against searchable fields.

        Args:
            term: Lower-cased, trimmed search term

        Returns:
            True if the title, body, excerpt, author or any tag contains the term
        """
        fields = [self.title, self.content, self.excerpt or "", self.author or ""]
        if any(term in field.lower() for field in fields):
            return True
        return any(term in tag.lower() for tag in self.tags)
