import asyncio

from Connectivity import HttpConnectivity
from ConversionEngine import ConversionEngine
from ConverterEvent import CategoryChanged, FromUnitChanged, InputChanged, ToUnitChanged
from CurrencyConverter import CurrencyConverter
from ReachabilityTracker import ReachabilityTracker
from UnitCatalog import load_categories, load_currency_category
from UnitConverter import UnitConverter


"""
Interactive text front end for the unit converter.

Overview
--------
`Main` presents a simple text menu to:
1) Choose a category.
2) Choose the unit to convert from.
3) Choose the unit to convert to.
4) Enter an amount.
5) Show the current conversion.
6) Exit.

Key behavior & dependencies
---------------------------
- Regular categories come from `UnitCatalog.load_categories()`; the currency
  category is added when the rate service can list its currencies.
- `HttpConnectivity` is polled in the background and feeds the converter's
  `ReachabilityTracker`, so currency conversions are refused while offline.
- The converter state is rendered after every action; panel-wide errors
  replace the conversion view.
- stdin is read in a worker thread so the event loop keeps running while
  the menu waits for input.
"""


class Main:
    """
    Interactive entry point that wires the catalog, monitor and converter together.
    """
    def __init__(self):
        """
        Attributes
        ----------
        currency_converter : CurrencyConverter
        connectivity : HttpConnectivity
        categories : list[Category]
        converter : UnitConverter
        """
        self.currency_converter = CurrencyConverter()
        self.connectivity = HttpConnectivity()
        self.categories = load_categories()

        currency = load_currency_category(self.currency_converter)
        if currency is not None:
            self.categories.append(currency)

        self.converter = UnitConverter(
            self.categories[0],
            engine=ConversionEngine(self.currency_converter),
            tracker=ReachabilityTracker(self.connectivity),
        )


    async def ask(self, prompt):
        return await asyncio.to_thread(input, prompt)


    async def choose(self, title, options):
        """
        List `options` numbered from 1 and return the chosen one, or None.
        """
        print(f"\n{title}:")
        for i, option in enumerate(options, start=1):
            print(f"{i}. {option}")
        choice = (await self.ask("Enter a number: ")).strip()
        if not choice.isdigit() or not 1 <= int(choice) <= len(options):
            print("Invalid choice.")
            return None
        return options[int(choice) - 1]


    def render(self, state):
        print()
        if state.error_message:
            print(f"[{state.category}] {state.error_message}")
            return

        print(f"[{state.category}]")
        print(f"Input:  {state.input_text} {state.from_unit}")
        if state.validation_message:
            print(f"        {state.validation_message}")
        print(f"Output: {state.output_text} {state.to_unit}")


    async def run(self):
        """
        Present the main menu until the user exits.
        """
        poll_task = asyncio.create_task(self.connectivity.poll())
        try:
            async with self.converter:
                while await self.step():
                    pass
        finally:
            poll_task.cancel()


    async def step(self):
        """
        Run one menu round. Returns False when the user chose to exit.
        """
        print("\nPlease choose an option:\n")
        print("1. Choose category")
        print("2. Choose unit to convert from")
        print("3. Choose unit to convert to")
        print("4. Enter amount")
        print("5. Show conversion")
        print("6. Exit\n")

        choice = (await self.ask("Enter your choice (1, 2, 3, 4, 5, or 6): ")).strip()
        state = self.converter.state

        if choice == "1":
            category = await self.choose("Categories", self.categories)
            if category is not None:
                await self.converter.handle(CategoryChanged(category))
                self.render(self.converter.state)

        elif choice in ("2", "3"):
            unit_name = await self.choose("Units", state.category.unit_names())
            if unit_name is not None:
                event = FromUnitChanged(unit_name) if choice == "2" else ToUnitChanged(unit_name)
                await self.converter.handle(event)
                self.render(self.converter.state)

        elif choice == "4":
            text = await self.ask(f"\nAmount in {state.from_unit}: ")
            await self.converter.handle(InputChanged(text))
            self.render(self.converter.state)

        elif choice == "5":
            self.render(state)

        elif choice == "6":
            print("Exiting the program.")
            return False

        else:
            print("Invalid choice.")

        return True


if __name__ == "__main__":
    main = Main()
    print("Welcome!")
    asyncio.run(main.run())
