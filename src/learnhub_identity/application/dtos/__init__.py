from learnhub_identity.application.dtos.user_dto import UserDTO

__all__ = ["UserDTO"]
