from django.urls import path

from .views import (
    AnswerQuestionView,
    ApprovalStatusView,
    ApprovalsView,
    CommentsView,
    LikesView,
    QuestionsView,
    SectionDetailView,
    SectionListView,
)

# Paths mirror the client's fetch wrappers, so no trailing slashes.
urlpatterns = [
    path("comments/<str:section>", CommentsView.as_view(), name="marketing-comments"),
    path("questions/<str:question_id>/answer", AnswerQuestionView.as_view(), name="marketing-question-answer"),
    path("questions/<str:section>", QuestionsView.as_view(), name="marketing-questions"),
    path("likes/<str:section>", LikesView.as_view(), name="marketing-likes"),
    path("approvals/<str:section>/status", ApprovalStatusView.as_view(), name="marketing-approval-status"),
    path("approvals/<str:section>", ApprovalsView.as_view(), name="marketing-approvals"),
    path("sections", SectionListView.as_view(), name="marketing-sections"),
    path("sections/<str:section>", SectionDetailView.as_view(), name="marketing-section-detail"),
]
