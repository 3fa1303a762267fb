"""
HTTP endpoints for marketing plan interactions.

Every response uses the envelope `{success, message, data}`.  Lists are
returned as `{<kind>: [{interaction, userContext}, ...]}`; writes return
the new record in the same `{interaction, userContext}` shape.  Errors
are wrapped by `marketing.exceptions.envelope_exception_handler`.
"""
import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import aggregation, approvals, likes, store
from .context import ActorContext
from .sections import table_of_contents, validate_section
from .serializers import (
    AnswerQuestionSerializer,
    CreateCommentSerializer,
    CreateQuestionSerializer,
    SubmitApprovalSerializer,
    ToggleLikeSerializer,
    many_with_context,
    with_context,
)

logger = logging.getLogger(__name__)

ENVELOPE = OpenApiResponse(description="{success, message, data} envelope")


def envelope(message: str, data=None, status_code=status.HTTP_200_OK, success=True) -> Response:
    body = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    return Response(body, status=status_code)


class SectionInteractionView(APIView):
    """
    GET lists one interaction kind for a section; subclasses implement POST.
    """
    permission_classes = [IsAuthenticated]
    kind = None
    label = None

    def get_serializer(self, serializer_class, section):
        return serializer_class(data=self.request.data, context={"request": self.request, "section": section})

    @extend_schema(responses={200: ENVELOPE})
    def get(self, request, section):
        section = validate_section(section)
        items = aggregation.read_kind(self.kind, section)
        return envelope(
            f"{self.label} retrieved successfully",
            {self.kind: many_with_context(self.kind, items)},
        )

    def created(self, message, record):
        return envelope(
            message,
            with_context(self.kind, aggregation.join(record)),
            status_code=status.HTTP_201_CREATED,
        )


# ---------- Comments ----------
class CommentsView(SectionInteractionView):
    """
    GET  /api/marketing/comments/{section}
    POST /api/marketing/comments/{section}   { "content": "...", "sectionId": "..." }
    """
    kind = store.COMMENTS
    label = "Comments"

    @extend_schema(request=CreateCommentSerializer, responses={201: ENVELOPE})
    def post(self, request, section):
        section = validate_section(section)
        ser = self.get_serializer(CreateCommentSerializer, section)
        ser.is_valid(raise_exception=True)
        record = store.add_comment(
            section,
            ActorContext.from_request(request),
            ser.validated_data["content"],
            section_anchor=ser.validated_data.get("sectionId") or "",
        )
        return self.created("Comment added successfully", record)


# ---------- Questions ----------
class QuestionsView(SectionInteractionView):
    """
    GET  /api/marketing/questions/{section}
    POST /api/marketing/questions/{section}   { "content": "...", "sectionId": "..." }
    """
    kind = store.QUESTIONS
    label = "Questions"

    @extend_schema(request=CreateQuestionSerializer, responses={201: ENVELOPE})
    def post(self, request, section):
        section = validate_section(section)
        ser = self.get_serializer(CreateQuestionSerializer, section)
        ser.is_valid(raise_exception=True)
        record = store.add_question(
            section,
            ActorContext.from_request(request),
            ser.validated_data["content"],
            section_anchor=ser.validated_data.get("sectionId") or "",
        )
        return self.created("Question added successfully", record)


class AnswerQuestionView(APIView):
    """
    PUT /api/marketing/questions/{questionId}/answer   { "answer": "..." }

    Answers once; a second answer is rejected with 409.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(request=AnswerQuestionSerializer, responses={200: ENVELOPE, 404: ENVELOPE, 409: ENVELOPE})
    def put(self, request, question_id):
        ser = AnswerQuestionSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        question = store.set_answer(question_id, ser.validated_data["answer"], ActorContext.from_request(request))
        return envelope(
            "Question answered successfully",
            with_context(store.QUESTIONS, aggregation.join(question)),
        )


# ---------- Likes ----------
class LikesView(SectionInteractionView):
    """
    GET  /api/marketing/likes/{section}
    POST /api/marketing/likes/{section}   { "reaction": "..." }  -> toggles the caller's like
    """
    kind = store.LIKES
    label = "Likes"

    @extend_schema(request=ToggleLikeSerializer, responses={200: ENVELOPE, 201: ENVELOPE})
    def post(self, request, section):
        section = validate_section(section)
        ser = self.get_serializer(ToggleLikeSerializer, section)
        ser.is_valid(raise_exception=True)
        result = likes.toggle(
            section,
            ActorContext.from_request(request),
            reaction=ser.validated_data.get("reaction"),
            section_anchor=ser.validated_data.get("sectionId"),
        )
        if not result.liked:
            return envelope("Like removed successfully", {"liked": False})
        return envelope(
            "Like added successfully",
            {"liked": True, **with_context(self.kind, aggregation.join(result.record))},
            status_code=status.HTTP_201_CREATED,
        )


# ---------- Approvals ----------
class ApprovalsView(SectionInteractionView):
    """
    GET  /api/marketing/approvals/{section}   full decision history
    POST /api/marketing/approvals/{section}   { "status": "approved|rejected|pending", "comments": "..." }
    """
    kind = store.APPROVALS
    label = "Approvals"

    @extend_schema(request=SubmitApprovalSerializer, responses={201: ENVELOPE})
    def post(self, request, section):
        section = validate_section(section)
        ser = self.get_serializer(SubmitApprovalSerializer, section)
        ser.is_valid(raise_exception=True)
        record = approvals.submit(
            section,
            ActorContext.from_request(request),
            ser.validated_data["status"],
            comments=ser.validated_data.get("comments"),
            section_anchor=ser.validated_data.get("sectionId"),
        )
        return self.created("Approval submitted successfully", record)


class ApprovalStatusView(APIView):
    """
    GET /api/marketing/approvals/{section}/status
    Current (latest) decision per user, plus the caller's own.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: ENVELOPE})
    def get(self, request, section):
        section = validate_section(section)
        statuses = approvals.current_statuses(section)
        return envelope(
            "Approval status retrieved successfully",
            {
                "currentStatus": approvals.current_status(section, request.user.id),
                "statuses": [{"userId": uid, "status": st} for uid, st in statuses.items()],
            },
        )


# ---------- Sections ----------
class SectionListView(APIView):
    """
    GET /api/marketing/sections   table of contents of the marketing plan
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: ENVELOPE})
    def get(self, request):
        return envelope("Sections retrieved successfully", {"sections": table_of_contents()})


class SectionDetailView(APIView):
    """
    GET /api/marketing/sections/{section}
    All four kinds for the section in one response, with counts.  Kinds
    that could not be read are listed in `errors` and returned empty.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: ENVELOPE})
    def get(self, request, section):
        aggregate = aggregation.read_section(section)
        data = {kind: many_with_context(kind, getattr(aggregate, kind)) for kind in aggregation.KINDS}
        data["stats"] = aggregation.summarize(aggregate)
        data["errors"] = aggregate.errors
        if not aggregate.ok:
            logger.warning("[MARKETING] Partial read for section=%s errors=%s", section, aggregate.errors)
            return envelope("Some interactions could not be retrieved", data, success=False)
        return envelope("Interactions retrieved successfully", data)
