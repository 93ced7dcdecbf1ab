"""Balance aggregation and greedy settlement planning for a group ledger."""
from typing import Dict, Iterable, List, Union
import logging

from errors import MissingMembersError
from models import CustomShares, EqualAll, EqualSubset, GroupRecord, Payment
from money import EPSILON, round_cents

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Miscellaneous"


class BalanceTable:
    """Running balances keyed by the group's member ids.

    The set of ids is fixed at construction; credits and debits against
    any other id are dropped.
    """

    def __init__(self, member_ids: Iterable[str]):
        self._balances = {member_id: 0.0 for member_id in member_ids}

    def __contains__(self, member_id) -> bool:
        return member_id in self._balances

    def __len__(self) -> int:
        return len(self._balances)

    @property
    def member_ids(self) -> List[str]:
        return list(self._balances)

    def credit(self, member_id, amount: float) -> bool:
        if member_id not in self._balances:
            return False
        self._balances[member_id] += amount
        return True

    def debit(self, member_id, amount: float) -> bool:
        return self.credit(member_id, -amount)

    def known(self, member_ids: Iterable[str]) -> List[str]:
        return [m for m in member_ids if m in self._balances]

    def rounded(self) -> Dict[str, float]:
        return {m: round_cents(v) for m, v in self._balances.items()}


def _as_group(group: Union[GroupRecord, dict]) -> GroupRecord:
    if isinstance(group, GroupRecord):
        return group
    return GroupRecord.model_validate(group)


class SettlementOptimizer:
    @staticmethod
    def apply_payment(table: BalanceTable, payment: Payment):
        """Payer moves up, payee moves down by the same amount"""
        amount = payment.normalized_amount
        table.credit(payment.paid_by, amount)
        table.debit(payment.paid_to, amount)

    @staticmethod
    def apply_expense(table: BalanceTable, expense):
        """Charge each participant their share and credit the payer in full"""
        if expense.is_payment:
            SettlementOptimizer.apply_payment(table, expense)
            return

        amount = expense.normalized_amount
        split = expense.split

        if isinstance(split, CustomShares):
            # Shares are not checked against the total; the payer absorbs any gap
            for member_id, share in split.shares.items():
                table.debit(member_id, share)
        elif isinstance(split, EqualSubset):
            valid = table.known(split.member_ids)
            if not valid:
                logger.debug("Skipping expense %s: no known members in split", expense.id)
                return
            share = amount / len(valid)
            for member_id in valid:
                table.debit(member_id, share)
        elif isinstance(split, EqualAll):
            share = amount / len(table)
            for member_id in table.member_ids:
                table.debit(member_id, share)
        else:
            raise TypeError(f"Unsupported split policy: {split!r}")

        table.credit(expense.paid_by, amount)

    @staticmethod
    def calculate_balances(group):
        """Calculate net balance for each member of a group"""
        group = _as_group(group)
        if group.members is None:
            raise MissingMembersError("Group record has no members")

        table = BalanceTable(group.members)
        if not len(table):
            return {}

        for payment in (group.payments or {}).values():
            SettlementOptimizer.apply_payment(table, payment)

        for expense in (group.expenses or {}).values():
            SettlementOptimizer.apply_expense(table, expense)

        return table.rounded()

    @staticmethod
    def minimize_transactions(balances):
        """Greedily pair the largest creditor with the largest debtor"""
        transfers = []

        creditors = []
        debtors = []

        for member_id, balance in balances.items():
            if balance > EPSILON:
                creditors.append((member_id, balance))
            elif balance < -EPSILON:
                debtors.append((member_id, -balance))

        creditors.sort(key=lambda x: x[1], reverse=True)
        debtors.sort(key=lambda x: x[1], reverse=True)

        i = j = 0
        while i < len(creditors) and j < len(debtors):
            creditor, cred_amt = creditors[i]
            debtor, deb_amt = debtors[j]

            settlement_amt = min(cred_amt, deb_amt)
            if settlement_amt > EPSILON:
                transfers.append({
                    "from": debtor,
                    "to": creditor,
                    "amount": round_cents(settlement_amt)
                })

            creditors[i] = (creditor, cred_amt - settlement_amt)
            debtors[j] = (debtor, deb_amt - settlement_amt)

            if creditors[i][1] < EPSILON:
                i += 1
            if debtors[j][1] < EPSILON:
                j += 1

        return transfers

    @staticmethod
    def optimize_settlements(group):
        """Balances and the transfers that clear them"""
        balances = SettlementOptimizer.calculate_balances(group)
        transfers = SettlementOptimizer.minimize_transactions(balances)

        return {
            "balances": balances,
            "transfers": transfers
        }

    @staticmethod
    def summarize_spending(group):
        """Total spent by the group, leaving out reimbursements"""
        group = _as_group(group)

        spending_by_category = {}
        count = 0
        for expense in (group.expenses or {}).values():
            if expense.is_payment:
                continue
            category = expense.category or DEFAULT_CATEGORY
            spending_by_category[category] = (
                spending_by_category.get(category, 0) + expense.normalized_amount
            )
            count += 1

        return {
            "total_spent": round_cents(sum(spending_by_category.values())),
            "spending_by_category": {c: round_cents(v) for c, v in spending_by_category.items()},
            "expense_count": count
        }
