from pydantic import BaseModel, Field, model_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class AuthorsServiceRules(BaseModel):
    base_url: str
    timeout_seconds: float = Field(default=5.0, gt=0)


class EnrichmentRules(BaseModel):
    max_workers: int = Field(default=8, ge=1)


class PaginationRules(BaseModel):
    default_size: int = Field(default=10, ge=1)
    max_size: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def _default_within_max(self) -> "PaginationRules":
        if self.default_size > self.max_size:
            raise ValueError("default_size must not exceed max_size")
        return self


class PublicationRules(BaseModel):
    title_min_length: int = Field(default=5, ge=1)
    title_max_length: int = Field(default=200, ge=1)
    text_max_length: int = Field(default=500, ge=1)
    editor_name_max_length: int = Field(default=100, ge=1)


class Rules(BaseModel):
    project: ProjectRules
    authors_service: AuthorsServiceRules
    enrichment: EnrichmentRules = Field(default_factory=EnrichmentRules)
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    publication: PublicationRules = Field(default_factory=PublicationRules)
