from storefront.models.book import Book
from storefront.models.delivery_zone import DeliveryZone
from storefront.models.user import User
from storefront.models.order import Order
from storefront.models.order_event import OrderEvent

# add ALL models here
