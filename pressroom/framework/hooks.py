import logging
from itertools import count


logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


class Hook:
    """
    Named extension point. Handlers run in ascending priority,
    ties in registration order.
    """

    _sequence = count()

    def __init__(self, name):
        self.name = name
        self._handlers = []

    def register(self, handler, priority=DEFAULT_PRIORITY):
        self.unregister(handler)
        self._handlers.append((priority, next(self._sequence), handler))
        self._handlers.sort(key=lambda entry: entry[:2])
        logger.debug(f'Registered {getattr(handler, "__qualname__", handler)} on {self.name} at priority {priority}')
        return handler

    def unregister(self, handler):
        self._handlers = [entry for entry in self._handlers if entry[2] is not handler]

    @property
    def handlers(self):
        return [handler for _, _, handler in self._handlers]

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.name}>'


class Action(Hook):
    def dispatch(self, *args, **kwargs):
        """Calls every handler and collects the non-empty fragments they return."""
        fragments = []
        for handler in self.handlers:
            fragment = handler(*args, **kwargs)
            if fragment:
                fragments.append(fragment)
        return fragments


class Filter(Hook):
    def apply(self, value, *args, **kwargs):
        """Passes value through every handler, each receiving the previous result."""
        for handler in self.handlers:
            value = handler(value, *args, **kwargs)
        return value


# handler(post, request) -> markup or None
render_editor = Action('render_editor')
# handler(screen) -> markup or None
print_styles = Action('print_styles')
print_footer_scripts = Action('print_footer_scripts')
# handler(directive, request) -> SaveDirective
before_save = Filter('before_save')
# handler(location, post_id, request) -> str
after_save_redirect = Filter('after_save_redirect')
