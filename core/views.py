from django.shortcuts import render


def page(request, title, **kwargs):
    """Placeholder panel page; the interesting part is the menu around it."""
    return render(request, "base.html", {"title": title})
