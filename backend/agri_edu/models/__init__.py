from agri_edu.models.user import User
from agri_edu.models.video import Video, EducationType
from agri_edu.models.additional_video import AdditionalVideo
from agri_edu.models.quiz import Quiz, QuizQuestion
from agri_edu.models.catalogue import Animal, Crop
from agri_edu.models.discussion import QuestionAndAnswer, Reply
from agri_edu.models.like import Like, ContentKind
from agri_edu.models.user_progress import UserProgress
from agri_edu.models.chat_message import ChatMessage

__all__ = [
    "User", "Video", "EducationType", "AdditionalVideo", "Quiz", "QuizQuestion",
    "Animal", "Crop", "QuestionAndAnswer", "Reply", "Like", "ContentKind",
    "UserProgress", "ChatMessage",
]
