from .actions import Action, ActionType
from .decoding import DecodedCall
from .routing import ChainDescriptor, Route, RouteKind, RoutingEntry
