from django.utils.functional import SimpleLazyObject

from .intent import SubmittedIntent


class SubmittedIntentMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.submitted_intent = SimpleLazyObject(lambda: SubmittedIntent.from_request(request))
        return self.get_response(request)
