from dataclasses import dataclass

from tour_booking.shared.domain import IsoDateTime, TripId


@dataclass(frozen=True)
class Trip:
    """ツアー催行回（外部から渡される読み取り専用データ）

    出発日時はデポジット期限・キャンセル料算定の唯一の基準となる。
    """

    id: TripId
    start_time: IsoDateTime
