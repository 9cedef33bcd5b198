"""JSON replacements for Django's HTML 404/500 pages."""

from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse({"error": "Not found"}, status=404)


def server_error(request):
    return JsonResponse({"error": "Something went wrong!"}, status=500)
