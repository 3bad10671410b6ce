from .views import cart_count


def cart(request):
    """Cart badge count for every page"""
    return {'cart_count': cart_count(request.session)}
