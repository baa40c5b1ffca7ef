from theseed.genomes.exc import (
    EmptyLocationException,
    InvalidPositionException,
    LocationException,
)


class ObjectValidation:
    @staticmethod
    def require_left_not_past_right(left: int, right: int):
        if left > right:
            raise InvalidPositionException(f"Positions must satisfy left <= right. Left: {left}, right: {right}")

    @staticmethod
    def require_paired_segments(segments):
        if len(segments) % 2 == 1:
            raise LocationException(
                f"Odd number of segment specifiers in location construction: {len(segments)} positions given"
            )

    @staticmethod
    def require_positive_length(length: int):
        if length < 1:
            raise LocationException(f"Region length must be positive: {length}")

    @staticmethod
    def require_location_has_regions(location):
        if not location.num_regions:
            raise EmptyLocationException("Location must have at least one region:\n{}".format(repr(location)))

    @staticmethod
    def require_same_contig(location1, location2):
        if location1.contig_id != location2.contig_id:
            raise LocationException(
                "Locations must be on the same contig:\n{}\n{}".format(repr(location1), repr(location2))
            )
