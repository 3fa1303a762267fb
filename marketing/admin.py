from django.contrib import admin

from .models import Approval, Comment, Like, Question

# user_context is a write-time snapshot; it stays read-only everywhere
SNAPSHOT_READONLY = ("user_context", "created_at")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "section", "section_anchor", "user", "created_at")
    list_filter = ("section", "created_at")
    search_fields = ("content", "user__username")
    readonly_fields = SNAPSHOT_READONLY


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "section", "user", "is_answered", "answered_by", "created_at")
    list_filter = ("section", "is_answered")
    search_fields = ("content", "answer", "user__username")
    readonly_fields = SNAPSHOT_READONLY + ("is_answered", "answer", "answered_by", "answered_at")


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ("id", "section", "user", "reaction", "created_at")
    list_filter = ("section", "reaction")
    search_fields = ("user__username",)
    readonly_fields = SNAPSHOT_READONLY


@admin.register(Approval)
class ApprovalAdmin(admin.ModelAdmin):
    list_display = ("id", "section", "user", "status", "created_at")
    list_filter = ("section", "status", "created_at")
    search_fields = ("comments", "user__username")
    readonly_fields = SNAPSHOT_READONLY
