# blog/filters.py

from __future__ import annotations

import django_filters

from .models import BlogPost


class BlogPostFilter(django_filters.FilterSet):
    tag = django_filters.CharFilter(method="filter_tag")
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")

    class Meta:
        model = BlogPost
        fields = ["tag", "category"]

    def filter_tag(self, queryset, name, value):
        # JSON containment is not portable to SQLite; match in Python.
        wanted = (value or "").strip().lower()
        if not wanted:
            return queryset
        ids = [
            pk
            for pk, tags in queryset.values_list("pk", "tags")
            if wanted in [str(t).lower() for t in (tags or [])]
        ]
        return queryset.filter(pk__in=ids)
