from flask_login import UserMixin


class AdminUser(UserMixin):
    """The signed-in administrator, as reported by the backend auth service."""

    def __init__(self, id, email, name=None, avatar=None, created_at=None):
        self.id = id
        self.email = email
        self.name = name
        self.avatar = avatar
        self.created_at = created_at

    @classmethod
    def from_auth_user(cls, user):
        meta = user.get("user_metadata") or {}
        return cls(
            id=user["id"],
            email=user.get("email") or "",
            name=meta.get("name"),
            avatar=meta.get("avatar_url"),
            created_at=user.get("created_at"),
        )

    @classmethod
    def from_session(cls, data):
        return cls(**data)

    def to_session(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "avatar": self.avatar,
            "created_at": self.created_at,
        }
