from .codec import PADDING_STRICT, PADDING_TRIM, VlcCodec, get_default_codec


class Compressor:
        # Compression Block: turns plaintext into packed hex text and back.
        # "vlc" trims the zero padding of the last byte on decode,
        # "vlc_strict" decodes every bit of it.
        METHOD_PADDING = {'vlc': PADDING_TRIM, 'vlc_strict': PADDING_STRICT}
        VALID_METHODS = set(METHOD_PADDING)

        def __init__(self, method='vlc', table=None):
            """
            Initializes the Compressor with the specified compression method.

            Parameters:
            method (str): The compression method to be used ('vlc' or 'vlc_strict').
            table (CodeTable, optional): Code table to use instead of the default one.
            """
            self.method = method.lower()
            if self.method not in self.VALID_METHODS:
                raise ValueError(f"Unsupported compression method: {self.method}")
            padding = self.METHOD_PADDING[self.method]
            if table is None and padding == PADDING_TRIM:
                self.codec = get_default_codec()
            else:
                self.codec = VlcCodec(table=table, padding=padding)

        def compress(self, plaintext: str) -> str:
            """
            Compresses the given plaintext using the specified method.

            Parameters:
            plaintext (str): The text to compress.

            Returns:
            str: Space-separated hex chunks.
            """
            if not isinstance(plaintext, str):
                raise TypeError("Input plaintext must be a string.")
            return self.codec.encode(plaintext)

        def decompress(self, compressed: str) -> str:
            """
            Decompresses packed hex text using the specified method.

            Parameters:
            compressed (str): Space-separated hex chunks.

            Returns:
            str: Decompressed text.
            """
            if not isinstance(compressed, str):
                raise TypeError("Input compressed data must be a string.")
            return self.codec.decode(compressed)
