import numpy as np

def count_bits(block, padding = 0):
    ''' Count the set bits of a block.

    INPUT
        (numpy unsigned int) block
        (int) padding = 0: number of high-order bits to ignore, only
              non-zero for the last block of a chromosome

    OUTPUT
        (int) number of set bits
    '''
    x = int(block)
    if padding:
        width = np.dtype(type(block)).itemsize * 8
        x &= (1 << (width - padding)) - 1
    return bin(x).count('1')

class BitChromosome():
    ''' Fixed-length string of bits packed into unsigned integer blocks.

    Logical bit i lives in block i // block_width, at position
    i % block_width counted from the least significant bit. The unused
    high-order bits of the last block are the padding.

    INPUT
        (int) length: number of logical bits
        (numpy dtype) block_type = np.uint32: storage block type
        (ndarray) blocks = None: initial storage, all zeros if not given
    '''

    def __init__(self, length, block_type = np.uint32, blocks = None):
        self.length = length
        self.block_type = np.dtype(block_type).type
        nblocks = -(-length // self.block_width)
        if blocks is None:
            self.blocks = np.zeros(nblocks, dtype = self.block_type)
        else:
            self.blocks = np.array(blocks, dtype = self.block_type)
            if self.blocks.shape != (nblocks,):
                raise ValueError(f"Expected {nblocks} blocks, got "
                                 f"{self.blocks.shape[0]}")

    @classmethod
    def from_bits(cls, bits, block_type = np.uint32):
        ''' Build a chromosome from a sequence of 0/1 values, logical bit
            0 first. Padding bits are zero. '''
        bits = np.asarray(bits, dtype = bool)
        chromosome = cls(bits.size, block_type = block_type)
        chromosome.blocks[:] = pack(bits, chromosome.nblocks,
            chromosome.block_type)
        return chromosome

    @classmethod
    def from_string(cls, string, block_type = np.uint32):
        ''' Build a chromosome from a string of '0' and '1'. '''
        if set(string) - {'0', '1'}:
            raise ValueError(f"Not a bit string: {string!r}")
        return cls.from_bits([c == '1' for c in string],
            block_type = block_type)

    @property
    def block_width(self):
        return np.dtype(self.block_type).itemsize * 8

    @property
    def nblocks(self):
        return self.blocks.shape[0]

    @property
    def padding(self):
        return self.nblocks * self.block_width - self.length

    def __len__(self):
        return self.length

    def _locate(self, index):
        if not 0 <= index < self.length:
            raise IndexError(f"Bit index {index} out of range for a "
                             f"chromosome of length {self.length}")
        return divmod(index, self.block_width)

    def get(self, index):
        ''' Read the bit at a logical position, returning 0 or 1. '''
        (block, pos) = self._locate(index)
        return (int(self.blocks[block]) >> pos) & 1

    def flip(self, index):
        ''' Toggle the bit at a logical position. '''
        (block, pos) = self._locate(index)
        self.blocks[block] ^= self.block_type(1 << pos)
        return self

    def set(self, index, value):
        if self.get(index) != bool(value):
            self.flip(index)
        return self

    def popcount(self):
        ''' Number of set bits, padding excluded. '''
        full = sum(count_bits(block) for block in self.blocks[:-1])
        return full + count_bits(self.blocks[-1], self.padding)

    def init_random(self, rng):
        ''' Set every logical bit with an unbiased coin flip. Padding bits
            are left at zero.

        INPUT
            (RandomSource) rng
        '''
        self.blocks[:] = pack(rng.flips(50, self.length), self.nblocks,
            self.block_type)
        return self

    def clone(self, other):
        ''' Copy all blocks, padding included, into another chromosome of
            the same shape. '''
        other.blocks[:] = self.blocks
        return other

    def copy(self):
        return BitChromosome(self.length, self.block_type, self.blocks)

    def to_bits(self):
        ''' Logical bits as a uint8 array, bit 0 first. '''
        raw = self.blocks.astype(self.blocks.dtype.newbyteorder('<'))
        return np.unpackbits(raw.view(np.uint8),
            bitorder = 'little')[:self.length]

    def to_string(self):
        return ''.join('1' if bit else '0' for bit in self.to_bits())

    def __eq__(self, other):
        return isinstance(other, BitChromosome) and \
               self.length == other.length and \
               np.array_equal(self.to_bits(), other.to_bits())

    def __repr__(self):
        return f'BitChromosome({self.to_string()!r})'

def pack(bits, nblocks, block_type):
    ''' Pack a boolean array into blocks, bit 0 in the least significant
        position of the first block. '''
    dtype = np.dtype(block_type).newbyteorder('<')
    raw = np.packbits(bits, bitorder = 'little')
    buffer = np.zeros(nblocks * dtype.itemsize, dtype = np.uint8)
    buffer[:raw.size] = raw
    return buffer.view(dtype).astype(block_type)

def clone(src, dst):
    ''' Copy a chromosome block by block into dst. '''
    return src.clone(dst)
