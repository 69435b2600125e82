from enum import Enum


class _Choice(str, Enum):
    """Enum whose value is its own tag, with a display label."""

    @property
    def label(self) -> str:
        return _LABELS.get(self.value, self.value.replace("_", " ").title())

    @classmethod
    def from_input(cls, text: str) -> "_Choice":
        tag = "_".join(text.strip().upper().replace("-", " ").replace("/", "_").split())
        try:
            return cls(tag)
        except ValueError:
            raise ValueError(f"Unknown {cls.__name__} value: {text!r}") from None

    @classmethod
    def selectable(cls) -> list:
        return [m for m in cls if m.value != "NOT_SELECTED"]


class JobTitle(_Choice):
    NOT_SELECTED = "NOT_SELECTED"
    ANDROID_DEVELOPER = "ANDROID_DEVELOPER"
    IOS_DEVELOPER = "IOS_DEVELOPER"
    FRONTEND_DEVELOPER = "FRONTEND_DEVELOPER"
    BACKEND_DEVELOPER = "BACKEND_DEVELOPER"
    JAVA_DEVELOPER = "JAVA_DEVELOPER"
    PYTHON_DEVELOPER = "PYTHON_DEVELOPER"
    QA_TESTER = "QA_TESTER"
    UI_UX_DESIGNER = "UI_UX_DESIGNER"
    PRODUCT_MANAGER = "PRODUCT_MANAGER"
    SCRUM_MASTER = "SCRUM_MASTER"
    OTHER = "OTHER"


class Gender(_Choice):
    NOT_SELECTED = "NOT_SELECTED"
    MALE = "MALE"
    FEMALE = "FEMALE"


# Labels that the default title-casing gets wrong
_LABELS = {
    "NOT_SELECTED": "Not selected",
    "IOS_DEVELOPER": "iOS Developer",
    "QA_TESTER": "QA Tester",
    "UI_UX_DESIGNER": "UI/UX Designer",
}
