from config import ToolType, LoanResult, DEFAULT_TOOL_TYPE, MIN_PRICE

class PowerTool:
    def __init__(self, manufacturer, model, tool_type, serial_number, price, borrowed=False):
        self._manufacturer = manufacturer
        self._model = model
        # Unknown tool types fall back to the default without any signal to the caller
        self._tool_type = ToolType.from_name(tool_type) or DEFAULT_TOOL_TYPE
        self._serial_number = serial_number
        self._price = price
        self._borrowed = borrowed

    @classmethod
    def essential(cls, manufacturer, model, serial_number):
        """Build a tool from the identifying fields only: a Drill priced at 0.0, not on loan"""
        return cls(manufacturer, model, DEFAULT_TOOL_TYPE.value, serial_number, MIN_PRICE)

    @property
    def manufacturer(self):
        return self._manufacturer

    @property
    def model(self):
        return self._model

    @property
    def tool_type(self):
        return self._tool_type.value

    @property
    def serial_number(self):
        return self._serial_number

    def get_tool_type(self):
        return self._tool_type.value

    def is_valid(self):
        return (bool(self._manufacturer) and
                bool(self._model) and
                bool(self._serial_number) and
                isinstance(self._tool_type, ToolType) and
                self._price >= MIN_PRICE)

    def borrow(self):
        if not self._borrowed:
            self._borrowed = True
            return LoanResult.BORROWED
        return LoanResult.ALREADY_ON_LOAN

    def return_tool(self):
        self._borrowed = False
        return LoanResult.RETURNED

    def change_price(self, new_price):
        if new_price >= MIN_PRICE:
            self._price = new_price
            return LoanResult.PRICE_UPDATED
        return LoanResult.INVALID_PRICE

    def check_price(self):
        return self._price

    def check_borrowed(self):
        return self._borrowed

    def get_details(self):
        """Raw field values in display order"""
        return [
            ("Manufacturer", self._manufacturer),
            ("Model", self._model),
            ("Tool Type", self._tool_type.value),
            ("Serial Number", self._serial_number),
            ("Price", self._price),
            ("Borrowed", self._borrowed),
        ]

    def display(self):
        from services.display_service import render_tool
        print(render_tool(self))
        print()

    def __str__(self):
        return f"{self._manufacturer} {self._model} ({self._tool_type.value}, {self._serial_number})"
