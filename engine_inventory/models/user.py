from flask_login import UserMixin


class Operator(UserMixin):
    """The single shared account. Not stored in the database."""

    def __init__(self, username: str):
        self.id = username
        self.username = username

    def __repr__(self):
        return f"<Operator {self.username}>"
