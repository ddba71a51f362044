from learnhub.application.dtos.content.category_dto import CategoryDTO
from learnhub.application.dtos.content.content_dto import ContentDTO

__all__ = ["CategoryDTO", "ContentDTO"]
