# marketing/serializers.py
from rest_framework import serializers

from .models import Approval, Comment, Like, Question
from . import store


# ---------- Interaction (READ) ----------
class BaseInteractionSerializer(serializers.ModelSerializer):
    sectionId = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)

    BASE_FIELDS = ["id", "section", "sectionId", "createdAt", "userId"]

    def get_sectionId(self, obj):
        return obj.section_anchor or None


class CommentSerializer(BaseInteractionSerializer):
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Comment
        fields = BaseInteractionSerializer.BASE_FIELDS + ["content", "updatedAt"]


class QuestionSerializer(BaseInteractionSerializer):
    answer = serializers.SerializerMethodField()
    isAnswered = serializers.BooleanField(source="is_answered", read_only=True)
    answeredBy = serializers.IntegerField(source="answered_by_id", read_only=True, allow_null=True)
    answeredAt = serializers.DateTimeField(source="answered_at", read_only=True, allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Question
        fields = BaseInteractionSerializer.BASE_FIELDS + [
            "content",
            "answer",
            "isAnswered",
            "answeredBy",
            "answeredAt",
            "updatedAt",
        ]

    def get_answer(self, obj):
        return obj.answer if obj.is_answered else None


class LikeSerializer(BaseInteractionSerializer):
    reaction = serializers.SerializerMethodField()

    class Meta:
        model = Like
        fields = BaseInteractionSerializer.BASE_FIELDS + ["reaction"]

    def get_reaction(self, obj):
        return obj.reaction or None


class ApprovalSerializer(BaseInteractionSerializer):
    comments = serializers.SerializerMethodField()
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Approval
        fields = BaseInteractionSerializer.BASE_FIELDS + ["status", "comments", "updatedAt"]

    def get_comments(self, obj):
        return obj.comments or None


KIND_SERIALIZERS = {
    store.COMMENTS: CommentSerializer,
    store.QUESTIONS: QuestionSerializer,
    store.LIKES: LikeSerializer,
    store.APPROVALS: ApprovalSerializer,
}


def with_context(kind: str, item) -> dict:
    """Render one aggregation item as {interaction, userContext}."""
    return {
        "interaction": KIND_SERIALIZERS[kind](item.interaction).data,
        "userContext": item.user_context.as_dict(),
    }


def many_with_context(kind: str, items) -> list[dict]:
    return [with_context(kind, item) for item in items]


# ---------- Requests (WRITE) ----------
class SectionBodyMixin(serializers.Serializer):
    """
    `section` in the body is optional; when sent it must match the path.
    Expects `context["section"]` to hold the (already validated) path value.
    """
    section = serializers.CharField(required=False)
    sectionId = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=128)

    def validate_section(self, value):
        expected = self.context.get("section")
        if expected is not None and value != expected:
            raise serializers.ValidationError("Body section does not match the URL section.")
        return value


class CreateCommentSerializer(SectionBodyMixin):
    content = serializers.CharField()


class CreateQuestionSerializer(SectionBodyMixin):
    content = serializers.CharField()


class AnswerQuestionSerializer(serializers.Serializer):
    answer = serializers.CharField()


class ToggleLikeSerializer(SectionBodyMixin):
    reaction = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)


class SubmitApprovalSerializer(SectionBodyMixin):
    status = serializers.ChoiceField(choices=Approval.Status.choices)
    comments = serializers.CharField(required=False, allow_blank=True, allow_null=True)
