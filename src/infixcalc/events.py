import logging


logger = logging.getLogger(__name__)


class Channel:
    '''
    Named notification channel.

    Subscribers are called synchronously, in the order they subscribed, with
    the published string payload.
    '''

    def __init__(self, name):
        self.name = name
        self.subscribers = []

    def subscribe(self, callback):
        '''
        Register callback. Returns it, so this doubles as a decorator.
        '''
        self.subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        self.subscribers.remove(callback)

    def publish(self, payload):
        logger.debug('%s <- %r', self.name, payload)
        for callback in list(self.subscribers):
            callback(payload)

    def __repr__(self):
        return 'Channel({!r})'.format(self.name)
