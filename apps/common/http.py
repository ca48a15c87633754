from django.http import JsonResponse


def flash(title: str, message: str = "", *, type: str = "error", status: int = 422, **extra) -> JsonResponse:
    payload = {"flash": {"type": type, "title": title, "message": message}}
    payload.update(extra)
    return JsonResponse(payload, status=status)


def form_errors(form) -> dict:
    return {field: [str(e) for e in errors] for field, errors in form.errors.items()}
