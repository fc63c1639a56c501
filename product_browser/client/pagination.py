class Pagination:
    """
    Current page number. ``previous_page`` never goes below ``initial_page``;
    ``set_page`` is taken as is.
    """

    def __init__(self, initial_page: int = 1):
        self.initial_page = initial_page
        self.page = initial_page

    def set_page(self, page: int) -> None:
        self.page = page

    def reset(self) -> None:
        self.page = self.initial_page

    def next_page(self) -> None:
        self.page += 1

    def previous_page(self) -> None:
        self.page = max(self.initial_page, self.page - 1)
