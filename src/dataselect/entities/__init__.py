"""Entities – domain entity lists selected through the pipeline."""
from dataselect.entities.listing import criteria_filters, find_list, find_list_page
from dataselect.entities.page import ResultPage
from dataselect.entities.product import Product, ProductCell, ProductCellAdapter
from dataselect.entities.rulechain_log import (
    RuleChainMsgLog,
    RuleChainMsgLogCell,
    RuleChainMsgLogCellAdapter,
)

__all__ = [
    "Product",
    "ProductCell",
    "ProductCellAdapter",
    "ResultPage",
    "RuleChainMsgLog",
    "RuleChainMsgLogCell",
    "RuleChainMsgLogCellAdapter",
    "criteria_filters",
    "find_list",
    "find_list_page",
]
