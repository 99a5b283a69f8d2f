from enum import Enum
import logging

from .events import Channel


logger = logging.getLogger(__name__)


def erasure(length):
    '''
    Input payload telling the display to erase length trailing positions.
    '''
    return ' ' * length


class ScanState(Enum):
    SCANNING = 'scanning'
    NUMBER_FOUND = 'number found'
    NUMBER_FINALIZED = 'number finalized'


class InputBuffer:
    '''
    Not yet evaluated input text.

    Every edit is reported on input_updated: appended text as is, removals
    as a run of blanks as long as what was removed.
    '''

    ALPHABET = frozenset(' 1234567890.()Xx!*/+-')
    NUMERIC = frozenset('1234567890.')

    def __init__(self, input_updated=None):
        self.chars = []
        self.input_updated = input_updated or Channel('input_updated')

    @property
    def text(self):
        return ''.join(self.chars)

    def __len__(self):
        return len(self.chars)

    def isvalid(self, text):
        return bool(text) and all(ch in type(self).ALPHABET for ch in text)

    def append(self, text):
        '''
        Append text if every character is accepted input.

        Rejected text changes nothing and is reported as an empty payload.
        '''
        if not self.isvalid(text):
            logger.debug('Rejected input %r', text)
            self.input_updated.publish('')
            return False
        self.chars.extend(text)
        self.input_updated.publish(text)
        return True

    def remove_last_char(self):
        '''
        Drop the last character, if any.
        '''
        if not self.chars:
            return
        self.chars.pop()
        self.input_updated.publish(erasure(1))

    def clear_last_number(self):
        '''
        Remove the last number along with the operators around it.

        Scans backward: first for the last number, then past it over the
        operators before it, stopping on the previous number. Everything after
        that previous number goes. Without a previous number, everything goes.

        Returns False, and does nothing, on an empty buffer.
        '''
        if not self.chars:
            return False
        state = ScanState.SCANNING
        for i in reversed(range(len(self.chars))):
            numeric = self.chars[i] in type(self).NUMERIC
            if state is ScanState.SCANNING and numeric:
                state = ScanState.NUMBER_FOUND
            elif state is ScanState.NUMBER_FOUND and not numeric:
                state = ScanState.NUMBER_FINALIZED
            elif state is ScanState.NUMBER_FINALIZED and numeric:
                removed = len(self.chars) - 1 - i
                del self.chars[i + 1:]
                logger.debug('Cleared last %d character(s)', removed)
                self.input_updated.publish(erasure(removed))
                return True
        self.clear()
        return True

    def clear(self):
        '''
        Drop everything, reporting the erasure of the whole line.
        '''
        self.input_updated.publish(erasure(len(self.chars)))
        self.chars.clear()

    def drain(self):
        '''
        Clear the buffer and return what was in it.
        '''
        text = self.text
        self.clear()
        return text
