class BitGAError(Exception):
    ''' Base class for all errors raised by bitga. '''
    pass

class ConfigError(BitGAError, ValueError):
    ''' Raised when the GA parameters are out of their valid ranges. '''
    pass

class AllocationError(BitGAError, MemoryError):
    ''' Raised when the population or offspring storage cannot be
        allocated. '''
    pass

class StateError(BitGAError, RuntimeError):
    ''' Raised when the evolution driver is used out of order. '''
    pass
