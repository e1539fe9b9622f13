from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ImageSource(BaseModel):
    src: str
    srcSet: str
    sizes: str


class ImageVariants(BaseModel):
    fallback: ImageSource


class ImageData(BaseModel):
    layout: str = "constrained"
    width: int
    height: Optional[int] = None
    images: ImageVariants


class FeaturedImage(BaseModel):
    imageData: ImageData


class Frontmatter(BaseModel):
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    title: Optional[str] = None
    date: Optional[str] = None
    daysAgo: Optional[int] = None
    excerpt: Optional[str] = None
    featuredImage: Optional[FeaturedImage] = None
    draft: bool = False


class Fields(BaseModel):
    slug: Optional[str] = None


class PostNode(BaseModel):
    id: str
    excerpt: Optional[str] = None
    timeToRead: Optional[int] = None
    fileAbsolutePath: Optional[str] = None
    frontmatter: Frontmatter = Field(default_factory=Frontmatter)
    fields: Fields = Field(default_factory=Fields)


class PostEdge(BaseModel):
    node: PostNode


class AllMarkdownRemark(BaseModel):
    edges: List[PostEdge] = Field(default_factory=list)


class PostsData(BaseModel):
    allMarkdownRemark: AllMarkdownRemark = Field(default_factory=AllMarkdownRemark)


class PageContext(BaseModel):
    base: str
    currentPage: int = Field(..., ge=1)
    pageCount: int = Field(..., ge=1)
    skip: int = Field(0, ge=0)
    limit: Optional[int] = Field(None, ge=1)

    @model_validator(mode="after")
    def _current_page_in_range(self):
        if self.currentPage > self.pageCount:
            raise ValueError(
                f"currentPage {self.currentPage} exceeds pageCount {self.pageCount}"
            )
        return self


class PostsPageProps(BaseModel):
    data: PostsData
    pageContext: PageContext
