"""
Custom throttling classes for API rate limiting.
History is kept in the default Django cache (Redis outside of tests).
"""
import time
from django.conf import settings
from django.core.cache import cache
from rest_framework.throttling import SimpleRateThrottle


class CacheRateThrottle(SimpleRateThrottle):
    """
    Base cache-backed rate throttle keyed by user id, or by IP for anonymous callers.
    """
    cache_format = 'ratelimit:%(scope)s:%(ident)s'

    default_rate = None

    def get_rate(self):
        # A scope listed in settings wins, including None to switch it off.
        rates = settings.REST_FRAMEWORK.get('DEFAULT_THROTTLE_RATES') or {}
        if self.scope in rates:
            return rates[self.scope]
        return self.default_rate

    def allow_request(self, request, view):
        """
        Check if request should be allowed.
        """
        if self.rate is None:
            return True

        self.key = self.get_cache_key(request, view)
        if self.key is None:
            return True

        self.history = cache.get(self.key, [])
        self.now = time.time()

        # Drop any requests from the history which have now passed the throttle duration
        while self.history and self.history[-1] <= self.now - self.duration:
            self.history.pop()

        if len(self.history) >= self.num_requests:
            return self.throttle_failure()

        return self.throttle_success()

    def throttle_success(self):
        self.history.insert(0, self.now)
        cache.set(self.key, self.history, self.duration)
        return True

    def get_cache_key(self, request, view):
        if request.user and request.user.is_authenticated:
            ident = request.user.pk
        else:
            ident = self.get_ident(request)

        return self.cache_format % {
            'scope': self.scope,
            'ident': ident
        }


class LoginThrottle(CacheRateThrottle):
    """
    Login API throttle: 5 requests per minute per IP (brute-force guard).
    """
    scope = 'login'
    default_rate = '5/min'

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request)
        }


class ReportThrottle(CacheRateThrottle):
    """
    Report API throttle: 30 requests per minute (aggregate queries).
    """
    scope = 'report'
    default_rate = '30/min'


class ExportThrottle(CacheRateThrottle):
    """
    Export API throttle: 10 requests per hour (file generation).
    """
    scope = 'export'
    default_rate = '10/hour'
