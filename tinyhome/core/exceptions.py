# TinyHome Module
# -*- coding: utf-8 -*-

# TinyHome Error Codes
ERR_DEVTYPE = 900

error_codes = {
    ERR_DEVTYPE: "Unknown device type",
    None: "Unknown Error",
}


class DeviceTypeError(ValueError):
    """Raised by create_device() when the type tag is not recognized.

    Attributes:
        code (int): TinyHome error code (ERR_DEVTYPE)
        dev_type: The tag that was rejected
    """

    def __init__(self, dev_type=None):
        self.code = ERR_DEVTYPE
        self.dev_type = dev_type
        super(DeviceTypeError, self).__init__(error_codes[ERR_DEVTYPE])
